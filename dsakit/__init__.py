"""Classic data structures and algorithms: number theory, bits, sorting, linked
lists, ordered sets, tries, range queries, backtracking, string search,
sequences, graphs and binary trees."""

__version__ = "0.1.0"