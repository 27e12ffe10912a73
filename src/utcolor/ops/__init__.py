"""Color operations applied to a buffer region."""

from utcolor.ops.colorize import (
    Scope,
    apply_gradient,
    apply_uniform,
    gradient_colors,
    resolve_scope,
)

__all__ = ["Scope", "apply_gradient", "apply_uniform", "gradient_colors", "resolve_scope"]
