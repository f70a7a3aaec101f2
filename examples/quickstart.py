"""
Quickstart for toyrobot.
- Runs a short session in-process and prints the reports
- Then steps the state machine by hand with parsed commands

Run from the repository root:
    python examples/quickstart.py
"""

from toyrobot import Context, lines_source, parse_line, process_command, run_lines

SESSION = [
    "PLACE 1,2,EAST",
    "MOVE",
    "MOVE",
    "LEFT",
    "MOVE",
    "REPORT",
]


def main() -> None:
    table, output = run_lines(SESSION)
    print("reports:", output)
    print("final pose:", table.pose)

    ctx = Context(lines_source([]), print)
    table = ctx.tabletop
    for line in ("place 0,0,south", "move", "report", "jump"):
        command, error = parse_line(line)
        if error:
            print("error:", error)
            continue
        table = process_command(ctx, table, command)


if __name__ == "__main__":
    main()
