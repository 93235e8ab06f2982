"""
British Royal Family tree creator.

1) Load the family tree from the data file, or start from the default data.
2) Offer a menu to add persons, print the tree, validate and plot it.
3) Save the tree back to the data file on "Save & Quit".

Type 'exit' at any prompt to terminate, 'back' to leave a sub-prompt.
"""

import logging
import sys
from collections.abc import Callable

from config import Settings, load_settings
from errors import FamilyTreeError
from generations import describe_generations
from plotting import plot_graph
from tree import FamilyTree, TreeState
from validation import find_duplicate_links, validate_graph

MENU = """------------------------------------------
Main Menu (type 'exit' to terminate):
  1) Add a new Person
  2) Print the Family Tree
  3) Save & Quit
  4) Just Quit
  5) Restore to Default
  6) Validate the Family Tree
  7) Plot the Family Tree
------------------------------------------"""

SEPARATOR = "------------------------------------------"


class ExitRequested(Exception):
    """The user typed 'exit' at a prompt."""


def is_numeric(text: str) -> bool:
    """True for a run of digits or exactly '-1' (still alive)."""
    if text == "-1":
        return True
    return bool(text) and all(c in "0123456789" for c in text)


def ask(read: Callable[[str], str], message: str) -> str:
    answer = read(message)
    if answer in ("exit", "EXIT"):
        raise ExitRequested
    return answer


def ask_number(read: Callable[[str], str], message: str, error: str) -> int | None:
    """Prompt until a number is given; None means the user typed 'back'."""
    while True:
        answer = ask(read, message)
        if answer == "back":
            return None
        if is_numeric(answer):
            return int(answer)
        print(error)


# ============================================================================
# Menu actions
# ============================================================================


def pick_parent(tree: FamilyTree, root: int, read: Callable[[str], str]) -> int | None:
    """Let the user choose a parent by generation; None if they backed out."""
    generations = tree.compute_generations(root)
    if not generations:
        print("No valid root or empty tree! Cannot add.")
        return None

    print(f"We have {len(generations)} generation(s) under index {root}.")
    for line in describe_generations(generations):
        print(f"  {line}")

    while True:
        choice = ask_number(
            read,
            f"Which generation is the parent in? (1 to {len(generations)}, 'back' to menu): ",
            "[Invalid input: must be a number or 'back'.]",
        )
        if choice is None:
            return None
        if not 1 <= choice <= len(generations):
            print("[Invalid generation index!]")
            continue

        members = generations[choice - 1]
        print(f"\n--- Members in Generation #{choice} ---")
        for number, index in enumerate(members, start=1):
            print(f"  ({number}) {tree.get_person(index).describe()}")
        print(SEPARATOR)

        while True:
            number = ask_number(
                read,
                f"Pick the parent number (1 to {len(members)}, or 'back'): ",
                "[Please enter a valid number or 'back'.]",
            )
            if number is None:
                break
            if 1 <= number <= len(members):
                return members[number - 1]
            print("[Invalid choice.]")


def add_person(tree: FamilyTree, root: int, read: Callable[[str], str]) -> int | None:
    print("\n[Add Person - type 'exit' to quit, 'back' to return.]")
    parent = pick_parent(tree, root, read)
    if parent is None:
        return None

    name = ask(read, "\nEnter new person's name (or 'exit'/'back'): ")
    if name == "back":
        return None
    birth = ask_number(
        read, "Enter birth year (or 'exit'/'back'): ", "[Please enter a numeric birth year.]"
    )
    if birth is None:
        return None
    death = ask_number(
        read,
        "Enter death year (-1 if still alive) (or 'exit'/'back'): ",
        "[Please enter a numeric death year or -1.]",
    )
    if death is None:
        return None

    index = tree.add_person(name, birth, death)
    tree.connect_parent_child(parent, index)

    print("\n[New Person Added]")
    print(f"   {tree.get_person(index).describe()}\n")
    print("Updated Family Tree")
    print(tree.render(root))
    print("===========================\n")
    return index


def validate(tree: FamilyTree):
    print("Validating graph...")
    warnings = validate_graph(tree.graph())
    warnings += [
        f"Duplicate link: {parent} -> {child}" for parent, child in find_duplicate_links(tree.store)
    ]
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")


def plot(tree: FamilyTree, settings: Settings):
    if settings.plot_file:
        print(f"Plotting graph to: {settings.plot_file}")
    else:
        print("Plotting graph...")
    try:
        plot_graph(tree.graph(settings.root_index), settings.plot_file)
    except FamilyTreeError as exc:
        print(f"[Could not plot the tree: {exc}]")
    except OSError as exc:
        # Graphviz missing or the file cannot be written
        print(f"[Could not plot the tree: {exc}]")


def run_menu(tree: FamilyTree, settings: Settings, read: Callable[[str], str] = input):
    root = settings.root_index
    while True:
        print(MENU)
        choice = ask(read, "Your choice: ")

        if choice == "1":
            add_person(tree, root, read)
        elif choice == "2":
            print("\nCurrent Family Tree")
            print(tree.render(root))
            print("===================\n")
        elif choice == "3":
            try:
                tree.save(settings.data_file)
                print(f"[Data saved to '{settings.data_file}'. Exiting...]")
            except FamilyTreeError as exc:
                print(f"[Error saving file: {exc}]", file=sys.stderr)
            return
        elif choice == "4":
            print("[Exiting without saving changes.]")
            return
        elif choice == "5":
            print("\n[Restoring default data. All custom changes will be LOST unless you save afterward.]")
            tree.reset_to_default()
            print("[All custom changes discarded. Restored default data.]")
        elif choice == "6":
            validate(tree)
        elif choice == "7":
            plot(tree, settings)
        else:
            print("[Invalid option. Please choose 1-7 or type 'exit'.]")


# ============================================================================
# Main
# ============================================================================


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    print("British Royal Family Tree Creator\n")
    tree = FamilyTree.open(settings.data_file)
    if tree.state is TreeState.LOADED:
        print(f"[Data loaded from '{settings.data_file}' successfully.]\n")
    else:
        print("[Initializing default British Royal data...]\n")

    try:
        run_menu(tree, settings)
    except (ExitRequested, EOFError):
        print("[Exiting program on user request.]")

    print("\nProgram Finished")


if __name__ == "__main__":
    main()
