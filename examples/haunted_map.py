"""Ghosts walking a desert map.

Two tokens start on ``11A`` and ``22A`` and follow the same ``LR`` tape.
``11A`` loops back to ``11Z`` every 2 steps and ``22A`` every 4, so both
sit on a ``Z`` node together after 4 steps.
"""

from tapewalk import Walker, analyze_tokens, combine, parse_puzzle

MAP = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, 22B)
22B = (22C, 22C)
22C = (22D, 22D)
22D = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""

puzzle = parse_puzzle(MAP)
walker = Walker(puzzle.graph, puzzle.tape, max_steps=10_000)

starts = sorted(node for node in puzzle.graph if node.endswith("A"))
records = analyze_tokens(walker, starts, lambda node: node.endswith("Z"))
answer = combine(record.steps for record in records)


if __name__ == "__main__":
    for record in records:
        print(f"{record.start} -> {record.node} every {record.steps} steps")
    print(f"All tokens accept together after {answer} steps")
