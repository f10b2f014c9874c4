from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install graphmatrix[networkx]"
    ) from e

import logging
import warnings
from typing import TYPE_CHECKING, Any, Iterable, Optional

if TYPE_CHECKING:
    from ..core.matrix import GraphMatrix

logger = logging.getLogger(__name__)


def to_nx(graph: GraphMatrix) -> nx.DiGraph:
    """Export a GraphMatrix to a NetworkX DiGraph.

    Parameters
    ----------
    graph : GraphMatrix
        Source matrix.

    Returns
    -------
    networkx.DiGraph
        Nodes ``0..dim-1`` (isolated vertices included), one edge per set
        entry.

    """
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.dimension()))
    G.add_edges_from(graph.nz_iter())
    logger.debug("to_nx: %d nodes, %d edges", G.number_of_nodes(), G.number_of_edges())
    return G


def from_nx(nxG: Any, nodelist: Optional[Iterable[Any]] = None) -> GraphMatrix:
    """Build a GraphMatrix from any NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | DiGraph | MultiGraph | MultiDiGraph
        Source graph.
    nodelist : iterable, optional
        Node order; node ``nodelist[i]`` becomes vertex ``i``. Edges touching
        nodes outside ``nodelist`` are skipped. Defaults to ``nxG.nodes()``
        order.

    Returns
    -------
    GraphMatrix

    Notes
    -----
    - Undirected edges are stored in both directions.
    - Parallel edges collapse to one entry.
    - Edge attributes (weights included) are dropped with a warning.

    """
    from ..core.matrix import GraphMatrix

    nodes = list(nxG.nodes()) if nodelist is None else list(nodelist)
    index = {v: i for i, v in enumerate(nodes)}
    if len(index) != len(nodes):
        raise ValueError("nodelist contains duplicate nodes")

    directed = nxG.is_directed()
    sources: list[int] = []
    targets: list[int] = []
    dropped_attrs = False
    for u, v, data in nxG.edges(data=True):
        if u not in index or v not in index:
            continue
        if data:
            dropped_attrs = True
        sources.append(index[u])
        targets.append(index[v])
        if not directed and u != v:
            sources.append(index[v])
            targets.append(index[u])

    if dropped_attrs:
        warnings.warn(
            "NetworkX -> GraphMatrix conversion is lossy: edge attributes are dropped",
            stacklevel=2,
        )
    return GraphMatrix.from_edges(sources, targets, dim=len(nodes))
