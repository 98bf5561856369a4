# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "eorjax"]
#
# [tool.uv.sources]
# eorjax = { path = ".." }
# ///
"""Evaluate Greenwich sidereal time over a span of dates.

Builds a grid of UT1 dates, then computes the Earth rotation angle, mean
sidereal time and apparent sidereal time for every date with a single
JIT-compiled, vmap'd call.  TT is approximated as UT1 plus a fixed offset.

Requires eorjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/sidereal_time.py [OPTIONS]

Examples:
    # One day at hourly steps starting from J2000.0
    uv run examples/sidereal_time.py --start-mjd 51544.5 --days 1 --step-hours 1

    # A year of daily values
    uv run examples/sidereal_time.py --days 365 --step-hours 24 --show 10
"""

import math
import time
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from eorjax import DJM0, era00, gmst06, gst06a, set_dtype

set_dtype(jnp.float64)  # Must be before any JIT compilation

_RAD2HOURS = 12.0 / math.pi


@jax.jit
def sidereal_times(mjd_ut1: jax.Array, mjd_tt: jax.Array) -> tuple[jax.Array, ...]:
    """ERA, GMST and GAST for arrays of UT1 and TT Modified Julian Dates."""

    def one(ut1, tt):
        return (
            era00(DJM0, ut1),
            gmst06(DJM0, ut1, DJM0, tt),
            gst06a(DJM0, ut1, DJM0, tt),
        )

    return jax.vmap(one)(mjd_ut1, mjd_tt)


def _hms(angle: float) -> str:
    hours = angle * _RAD2HOURS
    h = int(hours)
    m = int((hours - h) * 60.0)
    s = ((hours - h) * 60.0 - m) * 60.0
    return f"{h:02d}h {m:02d}m {s:07.4f}s"


def main(
    start_mjd: Annotated[float, typer.Option(help="First UT1 date as MJD")] = 60000.0,
    days: Annotated[float, typer.Option(help="Span of dates in days")] = 1.0,
    step_hours: Annotated[float, typer.Option(help="Spacing between dates in hours")] = 1.0,
    tt_minus_ut1: Annotated[float, typer.Option(help="TT - UT1 in seconds")] = 69.184,
    show: Annotated[int, typer.Option(help="Number of rows to print")] = 25,
) -> None:
    """Tabulate Earth rotation angle and Greenwich sidereal time."""
    n_steps = max(int(days * 24.0 / step_hours), 1)
    mjd_ut1 = start_mjd + jnp.arange(n_steps) * (step_hours / 24.0)
    mjd_tt = mjd_ut1 + tt_minus_ut1 / 86400.0

    print(f"Evaluating {n_steps} dates on {jax.devices()[0].platform.upper()}")

    t_start = time.perf_counter()
    era, gmst, gast = sidereal_times(mjd_ut1, mjd_tt)
    gast.block_until_ready()
    elapsed = time.perf_counter() - t_start
    print(f"  Compiled and evaluated in {elapsed:.2f}s")

    t_start = time.perf_counter()
    era, gmst, gast = sidereal_times(mjd_ut1, mjd_tt)
    gast.block_until_ready()
    elapsed = time.perf_counter() - t_start
    print(f"  Re-evaluated in {elapsed * 1e3:.1f}ms")

    print()
    print(f"{'MJD (UT1)':>14}  {'ERA':>18}  {'GMST':>18}  {'GAST':>18}")
    for i in range(min(show, n_steps)):
        print(
            f"{float(mjd_ut1[i]):14.6f}  {_hms(float(era[i])):>18}  "
            f"{_hms(float(gmst[i])):>18}  {_hms(float(gast[i])):>18}"
        )

    eqeq = (gast - gmst + jnp.pi) % (2.0 * jnp.pi) - jnp.pi
    print()
    print(
        f"Equation of the equinoxes: min {float(eqeq.min()) * _RAD2HOURS * 3600.0:+.4f}s, "
        f"max {float(eqeq.max()) * _RAD2HOURS * 3600.0:+.4f}s"
    )

    print("\nDone.")


if __name__ == "__main__":
    typer.run(main)
