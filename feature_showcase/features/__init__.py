"""Feature examples, one module per language feature.

Each module exposes ``run()``, which takes no input, returns nothing and
prints its demonstration to stdout. The driver calls them in the order of
``FEATURES``.
"""

from feature_showcase.features import (
    collection_literals,
    constructor_shorthand,
    default_lambda_parameters,
    variadic_parameters,
    lock_object,
    fixed_buffers,
    type_aliases,
    readonly_references,
)

FEATURES = [
    ("collection_literals", collection_literals.run),
    ("constructor_shorthand", constructor_shorthand.run),
    ("default_lambda_parameters", default_lambda_parameters.run),
    ("variadic_parameters", variadic_parameters.run),
    ("lock_object", lock_object.run),
    ("fixed_buffers", fixed_buffers.run),
    ("type_aliases", type_aliases.run),
    ("readonly_references", readonly_references.run),
]

__all__ = ["FEATURES"]
