from __future__ import annotations
import argparse, json, os
from charselect import config as CFG
from charselect.engine import Engine
from charselect.models import CharSelectGroup


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Character selector CLI (Engine-backed)")
    p.add_argument("--q", default="", help="Query; empty browses --group")
    p.add_argument("--group", default=CFG.DEFAULT_GROUP.value, help="Group browsed by an empty query")
    p.add_argument("-k", type=int, default=CFG.TOP_K, help="Top-K results")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    try:
        group = CharSelectGroup.parse(args.group)
    except ValueError as e:
        p.error(str(e))

    eng = Engine()
    try:
        eng.build(verbose=args.verbose or os.environ.get("CHARSELECT_VERBOSE") == "1")
        rows = eng.search(args.q, group, limit=args.k)
        if args.json:
            print(json.dumps(rows, ensure_ascii=False, indent=2))
            return 0
        if not rows:
            print("(no matches)"); return 0
        print("#   Glyph  Codepoints           Name")
        for i, r in enumerate(rows, 1):
            print(f"{i:<3} {r['glyph']:<6} {r['codepoints']:<20} {r['name']}")
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
