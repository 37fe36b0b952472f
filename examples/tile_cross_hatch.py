"""Example: resolve a two-family cross hatch onto a 10 x 5 tile."""

from hatchtile import LineGroup, PatternDefinition, build_pattern

DEFINITION = PatternDefinition(
    "CROSSHATCH",
    description="Diagonal cross hatch",
    is_model=True,
    line_groups=[
        LineGroup(40.0, 0.0, 0.0, 10.0, 5.0, (3.0, -1.0)),
        LineGroup(135.0, 0.0, 0.0, 10.0, 5.0, (2.0, -2.0)),
    ],
)


def main() -> None:
    converted = build_pattern(DEFINITION)
    print("Domain:", converted.domain)
    for idx, grid in enumerate(converted.grids):
        params = grid.as_dict()
        print(f"Line group {idx}:")
        for key, value in params.items():
            print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
