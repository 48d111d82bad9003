from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    from one_period_binomial import DEFAULT_INPUTS, evaluate
    from one_period_binomial.diagnostics.formatting import error_lines, result_summary
    from one_period_binomial.diagnostics.tree import format_frame, tree_tables
    from one_period_binomial.parsing import update_inputs

    ev = evaluate(DEFAULT_INPUTS)
    for card in result_summary(ev.result).values():
        print(f"{card['title']}: {card['value']}  ({card['description']})")
    print("p* =", ev.result.p)

    for title, df in tree_tables(ev.inputs, ev.result).items():
        print(f"\n{title}")
        print(format_frame(df).to_string(index=False))

    # An edit that breaks the tree: down state above the current price
    bad = evaluate(update_inputs(DEFAULT_INPUTS, "Sd", "45"))
    print("\n" + "\n".join(error_lines(bad.errors)))
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
