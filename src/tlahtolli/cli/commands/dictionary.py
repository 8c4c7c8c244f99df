"""
Dictionary commands.
"""

import sys
from rich import print_json

from tlahtolli.cli import client


def add_subparser(subparsers):
    # word
    word_p = subparsers.add_parser("word", help="Show details for a word")
    word_p.add_argument("word", help="Word to look up")
    word_p.add_argument("--json", action="store_true", help="Print raw JSON")
    word_p.set_defaults(func=word_show)

    # search
    search_p = subparsers.add_parser("search", help="Search the dictionary")
    search_p.add_argument("query", help="Substring of a word, meaning or synonym")
    search_p.set_defaults(func=dictionary_search)


def word_show(args):
    try:
        detail = client.get_word(args.word)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if detail is None:
        print(f"No entry for '{args.word}'.")
        return

    if args.json:
        print_json(data=detail)
        return

    print(f"{detail['word']} ({detail['part_of_speech']})")
    print(f"  {detail['meaning']}")
    if detail.get("etymology"):
        print(f"  Etymology: {detail['etymology']}")
    if detail.get("example"):
        print(f"  Example: {detail['example']}")
    if detail.get("synonyms"):
        print(f"  Synonyms: {', '.join(detail['synonyms'])}")
    if detail.get("related"):
        print(f"  Related: {', '.join(detail['related'])}")


def dictionary_search(args):
    try:
        results = client.search(args.query)
        if not results:
            print("No matches.")
            return
        for d in results:
            print(f"{d['word']:20}  {d['meaning']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
