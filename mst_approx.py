import math
from typing import Callable, Dict, Hashable, List, Sequence, Tuple

import networkx as nx

from city import euclidean_distance
from prim_mst import prim_mst


# =========================
# Main solver
# =========================

def mst_approx_solver(points: Sequence, distance: Callable = euclidean_distance, root: int = 0) -> list:
    """
    Approximate metric TSP solver (MST doubling, 2-approximation).

    Parameters:
        points (list): Cities to visit, distinct by identity.
        distance (callable): distance(a, b) -> float, symmetric and metric.
        root (int): Index in points of the city the tour starts from.

    Returns:
        list: The tour as point objects, starting and ending at points[root]
        and visiting every other point exactly once. Its length is at most
        twice the optimal tour length.
    """
    points = list(points)
    if not points:
        raise ValueError("Point list must not be empty.")
    if len({id(p) for p in points}) != len(points):
        raise ValueError("Point list contains the same point more than once.")
    if not 0 <= root < len(points):
        raise ValueError(f"Root index {root} out of range for {len(points)} points.")

    G = build_complete_graph(points, distance)
    tour = mst_approx_tour(G, root)
    return [G.nodes[i]["point"] for i in tour]


def mst_approx_tour(G: nx.Graph, root: int = 0) -> List[int]:
    """
    MST -> preorder walk -> shortcut cycle on an already complete graph.

    Returns:
        list: node tour [root, ..., root] covering every node of G.
    """
    tree = prim_mst(G, root)
    path = preorder_walk(tree, root)

    if len(path) != G.number_of_nodes():
        missing = G.number_of_nodes() - len(path)
        raise ValueError(
            f"Graph is not connected: {missing} node(s) unreachable from root {root}."
        )

    return hamiltonian_cycle(path)


# =========================
# Graph completion
# =========================

def build_complete_graph(points: Sequence, distance: Callable = euclidean_distance) -> nx.Graph:
    """Index points 0..n-1 (kept under the 'point' node attribute) and join every pair."""
    G = nx.Graph()
    for i, point in enumerate(points):
        G.add_node(i, point=point)
    return complete_graph(G, distance)


def complete_graph(G: nx.Graph, distance: Callable = euclidean_distance) -> nx.Graph:
    """
    Add the missing edges of G in place so that every pair of distinct nodes
    is joined. Edges already present keep their weight.
    """
    nodes = list(G.nodes())
    for i, u in enumerate(nodes):
        for v in nodes[i + 1 :]:
            if G.has_edge(u, v):
                continue
            weight = float(distance(G.nodes[u]["point"], G.nodes[v]["point"]))
            if math.isnan(weight) or weight < 0:
                raise ValueError(f"Invalid distance {weight} between nodes {u} and {v}.")
            G.add_edge(u, v, weight=weight)
    return G


# =========================
# Tree walk and shortcutting
# =========================

def preorder_walk(tree: Dict[Hashable, List[Tuple[Hashable, float]]], root: Hashable) -> list:
    """Depth-first preorder of tree from root, using an explicit stack."""
    order = [root]
    visited = {root}
    stack = [(root, 0)]

    while stack:
        node, pos = stack.pop()
        children = tree.get(node, [])
        while pos < len(children):
            child = children[pos][0]
            pos += 1
            if child not in visited:
                # resume node at pos once the child's subtree is done
                stack.append((node, pos))
                visited.add(child)
                order.append(child)
                stack.append((child, 0))
                break

    return order


def hamiltonian_cycle(path: Sequence) -> list:
    """Drop repeated visits from path and close it back to its first stop."""
    if not path:
        raise ValueError("Cannot build a cycle from an empty path.")

    visited = set()
    cycle = []
    for node in path:
        if node not in visited:
            visited.add(node)
            cycle.append(node)
    cycle.append(cycle[0])
    return cycle
