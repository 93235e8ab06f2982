"""Visualization functions for family tree graphs."""

import logging
from pathlib import Path

import networkx as nx
import pydot

from models import ALIVE

logger = logging.getLogger(__name__)


def build_dot(G: nx.DiGraph) -> pydot.Dot:
    """
    Build a Graphviz chart of the tree with ancestors at the top.

    Args:
        G: NetworkX DiGraph from build_graph (person nodes, PARENT_OF edges)
    """
    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "TB")  # Top-to-bottom (ancestors at top)
    P.set("splines", "ortho")
    P.set("nodesep", "0.4")
    P.set("ranksep", "0.6")

    for node, data in G.nodes(data=True):
        birth_year = data.get("birth_year", "")
        death_year = data.get("death_year", ALIVE)
        death_label = "" if death_year == ALIVE else death_year
        label = f"{data.get('person_name', '')}\n{birth_year}-{death_label}"

        P.add_node(
            pydot.Node(
                str(node),
                label=label,
                shape="box",
                style="rounded,filled",
                fillcolor="lightyellow" if death_year == ALIVE else "lightgray",
                fontsize="10",
            )
        )

    for u, v in G.edges():
        P.add_edge(pydot.Edge(str(u), str(v), color="darkgray"))

    return P


def to_dot(G: nx.DiGraph) -> str:
    """Return the DOT source of the chart without running Graphviz."""
    return build_dot(G).to_string()


def plot_graph(G: nx.DiGraph, output_path: Path | None = None):
    """
    Plot the family tree with the Graphviz hierarchical layout.

    Args:
        G: NetworkX DiGraph from build_graph
        output_path: Path to save the output (png, svg, pdf, or dot source). If None, displays interactively.
    """
    if output_path:
        output_path = Path(output_path)
        ext = output_path.suffix.lower().lstrip(".")
        if ext == "dot":
            # DOT source needs no Graphviz installation
            output_path.write_text(to_dot(G), encoding="utf-8")
        else:
            if ext not in ("png", "svg", "pdf"):
                ext = "png"
            build_dot(G).write(str(output_path), format=ext)
        logger.info("Graph saved to %s", output_path)
    else:
        # Render to a temporary file and display
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.TemporaryDirectory() as tmp:
            image_path = Path(tmp) / "family_tree.png"
            build_dot(G).write(str(image_path), format="png")
            img = mpimg.imread(image_path)
        plt.figure(figsize=(20, 16))
        plt.imshow(img)
        plt.axis("off")
        plt.tight_layout()
        plt.show()
