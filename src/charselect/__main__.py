from __future__ import annotations
import argparse, os, sys
from typing import Optional

from . import config as CFG
from .catalog import Catalog
from .engine import Engine
from .models import CharSelectGroup
from .selection import SelectionState

# Outcomes of one input line
CONTINUE, CONFIRM, QUIT = "continue", "confirm", "quit"


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


def handle_line(state: SelectionState, raw: str) -> str:
    """
    Map one input line onto session mutators (the picker's key bindings):
      ''         Enter   -> confirm
      :up/:down  arrows  -> move cursor
      :back      Backspace
      :clear     Ctrl-U
      :group     Ctrl-R (cycle group; :group- cycles backwards)
      :quit      Esc
    Anything else is typed into the query, one character at a time.
    """
    cmd = raw.strip().lower()
    if raw == "":
        return CONFIRM
    if cmd in (":quit", ":q", ":esc"):
        return QUIT
    if cmd == ":up":
        state.move_up()
    elif cmd == ":down":
        state.move_down()
    elif cmd == ":back":
        state.backspace()
    elif cmd == ":clear":
        state.clear_query()
    elif cmd == ":group":
        state.cycle_group()
    elif cmd == ":group-":
        state.cycle_group(reverse=True)
    else:
        for ch in raw:
            state.append_char(ch)
    return CONTINUE


def render(state: SelectionState, catalog: Catalog) -> str:
    result = state.current_result()
    lines = [_c(f"Select: {state.query}_", "1;37") + _c(f"   [{state.group.label}] {len(result):,} matches", "2;37")]
    if not result:
        lines.append(_c("(no matches)", "2;37"))
    for display_idx, idx in state.visible_rows():
        row = catalog.display_row(idx)
        lines.append(_c(f"> {row}", "1;30;47") if display_idx == state.cursor else f"  {row}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Character selector REPL (emoji, Unicode names, Nerd Font glyphs)")
    parser.add_argument("--group", default=CFG.DEFAULT_GROUP.value,
                        help="Starting group, e.g. smileys_and_emotion, flags, unicode_names")
    parser.add_argument("--rows", type=int, default=CFG.DEFAULT_VIEWPORT_HEIGHT, help="Visible rows")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    try:
        group = CharSelectGroup.parse(args.group)
    except ValueError as e:
        parser.error(str(e))

    verbose = args.verbose or os.environ.get("CHARSELECT_VERBOSE") == "1"
    eng = Engine()
    eng.build(verbose=verbose)
    try:
        state = eng.new_session(group, viewport_height=args.rows)
        print("Type to search; empty line selects.")
        print(_c("Commands: :up, :down, :back, :clear, :group, :quit", "2;37"))
        selected: Optional[str] = None
        while True:
            print(render(state, eng.catalog))
            try:
                raw = input("> ")
            except EOFError:
                print(); break
            action = handle_line(state, raw)
            if action == QUIT:
                break
            if action == CONFIRM:
                # Enter on an empty result is ignored, like the picker does
                if not state.current_result():
                    continue
                selected = eng.glyph(state.confirm())
                break
        if selected is not None:
            print(selected)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    sys.exit(main())
