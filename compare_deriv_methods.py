"""Quick comparison of the derivative engines in gradkit.

Run with:
    python compare_deriv_methods.py
"""

from __future__ import annotations

from typing import Any

import numpy as np

from gradkit.derivative_kit import DerivativeKit


def rel_err(a: float, b: float) -> float:
    """Relative error with a safe denominator."""
    d = max(1.0, abs(a), abs(b))
    return abs(a - b) / d


rng = np.random.default_rng(12345)

def noisy_sin(x: float, noise_level: float = 1e-6) -> float:
    return float(np.sin(x) + noise_level * rng.normal())


def main() -> None:
    """Main comparison routine."""
    cases: list[dict[str, Any]] = [
        {"name": "sin", "f": np.sin, "df": np.cos, "x0_grid": [0.1, 0.7, 1.3]},
        {"name": "exp", "f": np.exp, "df": np.exp, "x0_grid": [-0.5, 0.0, 1.0]},
        {"name": "noisy sin", "f": noisy_sin, "df": np.cos, "x0_grid": [0.7]},
    ]

    method_configs: list[tuple[str, str, dict[str, Any]]] = [
        ("forward", "finite", {"method": "forward", "step": 1e-4}),
        ("backward", "finite", {"method": "backward", "step": 1e-4}),
        ("central", "finite", {"method": "central", "step": 1e-4}),
        ("central (threads)", "finite", {"method": "central", "step": 1e-4, "concurrent": True}),
        ("local fit", "local_fit", {"step": 1e-2}),
        ("local fit+gauss", "local_fit", {"step": 1e-2, "weighter": "gaussian"}),
    ]

    line = "-" * 80

    for case in cases:
        print(line)
        print(f"Function: {case['name']!r}, first derivative")
        print(line)

        for x0 in case["x0_grid"]:
            dk = DerivativeKit(case["f"], float(x0))
            truth = float(case["df"](x0))
            print(f"\nx0 = {x0:.6g}, analytic = {truth:.12g}")
            print("  {:>18s}  {:>18s}  {:>18s}".format("method", "estimate", "rel_err"))
            print("  " + "-" * 60)

            for label, engine, kw in method_configs:
                est = float(dk.differentiate(method=engine, **kw))
                print(f"  {label:>18s}  {est:18.10e}  {rel_err(est, truth):18.10e}")

        print()


if __name__ == "__main__":
    main()
