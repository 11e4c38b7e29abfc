import math
import os

import networkx as nx
import matplotlib.pyplot as plt

from city import cities_from_coordinates
from file_utils import *

def data_parser(input_data):
    """
    Parsing input data
    """
    number_of_cities = int(input_data[0][0])
    coordinates = [(float(line[0]), float(line[1])) for line in input_data[1:]]
    return number_of_cities, coordinates

def input_file_to_instance(file):
    """
    Create the list of cities described by a specific file.

    Parameters:
        file (str): Path of the input file.

    Returns:
        list: One City per coordinate line, named by its index (0 to n - 1).

    Notes:
        The file holds the number of cities n on its first line,
        followed by n lines "x y".
    """
    input_data = read_file(file)
    number_of_cities, coordinates = data_parser(input_data)
    if len(coordinates) != number_of_cities:
        raise ValueError(
            f"Expected {number_of_cities} cities, found {len(coordinates)} coordinate lines."
        )
    return cities_from_coordinates(coordinates)

def is_metric(G):
    """
    Check whether a given graph G is metric or not,
    i.e., whether triangle inequality holds.
    """
    d = nx.floyd_warshall(G)
    for u, v, data in G.edges(data=True):
        if abs(d[u][v] - data['weight']) >= 0.001:
            return False
    return True

def is_connected(G):
    """
    Check whether a graph G is connected or not
    """
    return nx.is_connected(nx.to_undirected(G))

def is_valid_input(file: str) -> tuple:
    """
    Check if the given input file is valid.

    Parameters:
        file (str): Path to the input file.

    Returns:
        tuple: A tuple containing:
            - is_valid (bool): Whether the input file is valid.
            - message (str): A log message providing details about the validation result.
    """
    is_valid = True
    message = ''

    input_data = read_file(file)
    try:
        number_of_cities, coordinates = data_parser(input_data)
    except (IndexError, ValueError):
        return False, "Cannot parse data"

    if number_of_cities < 1:
        is_valid = False
        message += 'at least one city required\n'

    if number_of_cities > MAXIMUM_NUMBER_OF_CITIES:
        is_valid = False
        message += 'maximum number of cities exceeded\n'

    if len(coordinates) != number_of_cities:
        is_valid = False
        message += 'number of cities not correct\n'

    if any(len(line) != 2 for line in input_data[1:]):
        is_valid = False
        message += 'coordinate line without exactly two values\n'

    for x, y in coordinates:
        if not (math.isfinite(x) and math.isfinite(y)):
            is_valid = False
            message += 'coordinate not finite\n'
            break
        if round(x, ndigits=MAXIMUM_FLOAT_DIGITS) != x or round(y, ndigits=MAXIMUM_FLOAT_DIGITS) != y:
            is_valid = False
            message += 'maximum float digits exceeded\n'
            break

    return is_valid, message

def tour_length(G, tour):
    """Sum of the edge weights along tour, staying put costs nothing"""
    return sum(G[tour[i - 1]][tour[i]]['weight'] for i in range(1, len(tour)) if tour[i - 1] != tour[i])

def analyze_tour(G, tour):
    """
    Analyze a tour over the nodes of G.

    Parameters:
        G (nx.Graph): The graph representing the problem.
        tour (list): The tour, as a list of nodes.

    Returns:
        is_legitimate (bool): Whether the tour is legitimate or not.
        length (float): Total length of the tour.

    Notes:
        A tour is legitimate if the following conditions hold:
        - The tour is closed: it begins and ends at the same node.
        - Every node of the graph is visited exactly once in between.
        - The tour can only go through existing edges in the graph.

        An illegitimate tour has a length of positive infinity.

    Examples:
        For the unit square with cities 0 (0, 0), 1 (0, 1), 2 (1, 1), 3 (1, 0):
            tour = [0, 1, 2, 3, 0]

        The output would thus be:
            True, 4.0
    """
    if len(tour) < 2 or tour[0] != tour[-1]:
        print("not cycle")
        return False, float('infinity')
    inner = tour[:-1]
    if len(set(inner)) != len(inner):
        print("node visited more than once")
        return False, float('infinity')
    if set(inner) != set(G.nodes()):
        print("Not visit every node in G")
        return False, float('infinity')
    length = 0.0
    for i in range(1, len(tour)):
        if tour[i - 1] == tour[i]:
            continue
        if not G.has_edge(tour[i-1], tour[i]):
            print(f"edge{tour[i-1], tour[i]} not exist")
            return False, float('infinity')
        length += float(G[tour[i-1]][tour[i]]['weight'])
    return True, length

def write_tour_to_out(tour, length, in_file, out_dir=None):
    """
    Write a tour of cities to the .out file matching in_file:
    the city names on one line, the tour length on the next.
    """
    if out_dir is None:
        out_dir = os.path.join(os.getcwd(), OUTPUT_FILE_DIRECTORY)
    if not os.path.exists(out_dir):
        os.makedirs(out_dir)
    file_name = os.path.splitext(os.path.basename(in_file))[0] + '.out'
    out_file_path = os.path.join(out_dir, file_name)
    data = []
    data.append(' '.join(str(city.name) for city in tour))
    data.append(str(round(length, ndigits=MAXIMUM_FLOAT_DIGITS)))
    write_to_file(out_file_path, '\n'.join(data))
    return out_file_path

def draw_tour(G, tour, ax=None, with_weight=False):
    """Draw the cities at their coordinates with the tour edges highlighted"""
    if ax is None:
        ax = plt.gca()
    pos = {node: (data['point'].x, data['point'].y) for node, data in G.nodes(data=True)}
    tour_edges = [(tour[i - 1], tour[i]) for i in range(1, len(tour)) if tour[i - 1] != tour[i]]

    nx.draw_networkx_nodes(G, pos, ax=ax, node_color='skyblue', node_size=300)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=10)
    nx.draw_networkx_edges(G, pos, ax=ax, edgelist=tour_edges, edge_color='tab:red', width=2)

    if with_weight:
        edge_labels = {(u, v): round(G[u][v]['weight'], 2) for u, v in tour_edges}
        nx.draw_networkx_edge_labels(G, pos, edge_labels=edge_labels, ax=ax)
    return ax
