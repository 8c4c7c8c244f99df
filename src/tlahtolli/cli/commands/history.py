"""
History, saved words, sessions and stats commands.
"""

import platform
import sys

from tlahtolli.cli import client


def add_subparser(subparsers):
    # history
    hist_p = subparsers.add_parser("history", help="Show recent translations")
    hist_p.add_argument("-n", "--limit", type=int, default=20, help="Number of items")
    hist_p.add_argument("--clear", action="store_true", help="Clear history")
    hist_p.set_defaults(func=history_show)

    # saved
    saved_p = subparsers.add_parser("saved", help="Saved words")
    saved_sub = saved_p.add_subparsers(dest="saved_command", required=True)

    list_p = saved_sub.add_parser("list", help="List saved words")
    list_p.set_defaults(func=saved_list)

    add_p = saved_sub.add_parser("add", help="Save a word pair")
    add_p.add_argument("word", help="Original word")
    add_p.add_argument("translation", help="Its translation")
    add_p.add_argument("--source", default="na", choices=["na", "es"], help="Source language")
    add_p.set_defaults(func=saved_add)

    rm_p = saved_sub.add_parser("remove", help="Remove a saved word")
    rm_p.add_argument("item_id", help="Saved item ID")
    rm_p.set_defaults(func=saved_remove)

    # session
    session_p = subparsers.add_parser("session", help="Start a new session")
    session_p.add_argument("--device", default=platform.platform(), help="Device description")
    session_p.set_defaults(func=session_new)

    # stats
    stats_p = subparsers.add_parser("stats", help="Usage statistics")
    stats_p.set_defaults(func=stats_show)


def history_show(args):
    try:
        if args.clear:
            client.clear_history()
            print("✓ History cleared")
            return

        items = client.list_history(args.limit)
        if not items:
            print("No history.")
            return
        for h in items:
            conf = h.get("confidence_score")
            conf_str = f"{conf:.2f}" if conf is not None else "  - "
            print(f"{h['source_language']}→{h['target_language']}  {conf_str}  "
                  f"{h['original_text']}  →  {h['translated_text']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def saved_list(args):
    try:
        items = client.list_saved()
        if not items:
            print("No saved words.")
            return
        for h in items:
            print(f"{h['id']}  {h['original_text']}  →  {h['translated_text']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def saved_add(args):
    target = "es" if args.source == "na" else "na"
    try:
        client.save_word(args.word, args.translation, args.source, target)
        print(f"✓ Saved: {args.word} → {args.translation}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def saved_remove(args):
    try:
        client.remove_saved(args.item_id)
        print(f"✓ Removed: {args.item_id}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def session_new(args):
    try:
        session = client.create_session(args.device)
        print(f"✓ Session: {session['session_id']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def stats_show(args):
    try:
        stats = client.get_stats()
        print(f"Total translations: {stats['total']}")
        print(f"  na → es: {stats['na_es']}")
        print(f"  es → na: {stats['es_na']}")
        print(f"Sessions: {stats['sessions']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
