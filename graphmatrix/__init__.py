# graphmatrix/__init__.py
"""graphmatrix: compressed-row boolean adjacency matrices for directed graphs."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "graphmatrix.adapters",
    "core": "graphmatrix.core",
    "algorithms": "graphmatrix.algorithms",
    # adapter modules (direct convenience)
    "scipy": "graphmatrix.adapters.scipy_adapter",
    "dataframe": "graphmatrix.adapters.dataframe_adapter",
    "networkx": "graphmatrix.adapters.networkx_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "GraphMatrix": ("graphmatrix.core.matrix", "GraphMatrix"),
    "NZIterator": ("graphmatrix.core._Iterator", "NZIterator"),
    "sort_ij": ("graphmatrix.core._BulkOps", "sort_ij"),
    "uniq_sorted": ("graphmatrix.core._BulkOps", "uniq_sorted"),
    "locate": ("graphmatrix.core._helpers", "locate"),
    # Errors
    "GraphMatrixError": ("graphmatrix.core._errors", "GraphMatrixError"),
    "InvalidDimensionError": ("graphmatrix.core._errors", "InvalidDimensionError"),
    "LengthMismatchError": ("graphmatrix.core._errors", "LengthMismatchError"),
    "IndexOutOfRangeError": ("graphmatrix.core._errors", "IndexOutOfRangeError"),
    "InvalidStructureError": ("graphmatrix.core._errors", "InvalidStructureError"),
    # SciPy
    "to_scipy": ("graphmatrix.adapters.scipy_adapter", "to_scipy"),
    "from_scipy": ("graphmatrix.adapters.scipy_adapter", "from_scipy"),
    # DataFrames (Polars out, Narwhals in)
    "to_dataframe": ("graphmatrix.adapters.dataframe_adapter", "to_dataframe"),
    "from_dataframe": ("graphmatrix.adapters.dataframe_adapter", "from_dataframe"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("graphmatrix.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("graphmatrix.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("graphmatrix")
except PackageNotFoundError:
    __version__ = "0.0.0"
