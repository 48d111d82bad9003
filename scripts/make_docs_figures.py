from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt

from one_period_binomial import (
    DEFAULT_INPUTS,
    InvalidInputsError,
    PricingInputs,
    price,
    require_valid,
)
from one_period_binomial.diagnostics.tree import plot_price_trees


def main() -> None:
    ap = argparse.ArgumentParser(description="Render one-period tree charts.")
    for name, default in DEFAULT_INPUTS.as_dict().items():
        ap.add_argument(f"--{name}", type=float, default=default)
    ap.add_argument("--out", type=Path, default=None)
    args = ap.parse_args()

    out_dir = args.out or Path(__file__).resolve().parents[1] / "docs" / "assets"
    out_dir.mkdir(parents=True, exist_ok=True)

    inputs = PricingInputs(
        **{name: getattr(args, name) for name in DEFAULT_INPUTS.as_dict()}
    )
    try:
        require_valid(inputs)
    except InvalidInputsError as e:
        ap.error("; ".join(e.errors.values()))

    fig, _ = plot_price_trees(inputs, price(inputs))
    path = out_dir / "one_period_trees.png"
    fig.savefig(path, dpi=200)
    plt.close(fig)

    print(f"Wrote: {path}")


if __name__ == "__main__":
    main()
