"""Pure functions for computing statistics over method bundles."""

from __future__ import annotations

from collections import Counter

from .bundle import MethodBundle


def count_method_kinds(bundle: MethodBundle) -> dict[str, int]:
    """Return a frequency map of method kinds in *bundle*.

    Args:
        bundle: A generated method bundle.

    Returns:
        A dict mapping kind names ("is", "as", "as_mut", "into") to their
        occurrence counts. Empty dict for a bundle without methods.
    """
    return dict(Counter(method.kind.value for method in bundle.methods))
