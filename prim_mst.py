import heapq
import math
from itertools import count
from typing import Dict, List, Tuple

import networkx as nx


def prim_mst(G: nx.Graph, root: int = 0) -> Dict[int, List[Tuple[int, float]]]:
    """
    Minimum spanning tree of G via Prim's algorithm.

    Parameters:
        G (nx.Graph): Undirected weighted graph, edge weights under 'weight'.
        root (int): Node the tree is grown from.

    Returns:
        dict: parent node -> list of (child node, edge weight), children in
        the order they joined the tree. Leaves have no entry.

    Notes:
        Only the component containing root is spanned; unreachable nodes are
        simply absent from the tree.

        The heap has no decrease-key, so a cheaper offer for a pending node
        pushes a new entry and the older one is dropped when it surfaces
        (its weight no longer matches best[node]).
    """
    if root not in G:
        raise ValueError(f"Root {root} is not a node of the graph.")

    tree: Dict[int, List[Tuple[int, float]]] = {}
    settled = set()
    best: Dict[int, float] = {root: 0.0}
    parent: Dict[int, int] = {}

    # (weight, push order, node): push order breaks ties deterministically
    seq = count()
    heap = [(0.0, next(seq), root)]

    while heap:
        weight, _, current = heapq.heappop(heap)
        if current in settled or weight > best[current]:
            continue
        settled.add(current)

        if current in parent:
            tree.setdefault(parent[current], []).append((current, weight))

        for adj, data in G[current].items():
            if adj in settled:
                continue
            w = float(data["weight"])
            if w < best.get(adj, math.inf):
                best[adj] = w
                parent[adj] = current
                heapq.heappush(heap, (w, next(seq), adj))

    return tree


def mst_weight(tree: Dict[int, List[Tuple[int, float]]]) -> float:
    """Total weight of a tree returned by prim_mst."""
    return sum(w for children in tree.values() for _, w in children)


def mst_edge_count(tree: Dict[int, List[Tuple[int, float]]]) -> int:
    return sum(len(children) for children in tree.values())
