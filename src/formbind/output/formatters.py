"""Human/JSON output helpers.

The CLI renders BindingResults for humans (Rich tables) or machines
(--json). This module picks the mode; renderers.py does the drawing.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from formbind.output.renderers import model_state, render_results

if TYPE_CHECKING:
    from formbind.binding.results import BindingResults


def format_results(
    results: BindingResults,
    *,
    model: Any = None,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format BindingResults (and optionally the model state) for display."""
    if json_output:
        payload = results.to_dict()
        if verbose:
            payload["meta"] = results.meta
        if model is not None:
            payload["model"] = model_state(model)
        return _json.dumps(payload, indent=2, default=str)
    return render_results(results, model=model, verbose=verbose)
