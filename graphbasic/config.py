"""Configuration file parser."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Dict, List, Mapping, TextIO, Tuple, Type, TypeVar

import yaml

from graphbasic.graph import Graph, GraphError

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses override the "required" and "optional" properties. Usage:

        cfg = GraphConfig.load(Path("graphbasic.yml"))
        cfg.validate()

    The caller must call validate(). Problems are reported with
    logging.error rather than exceptions, so with the default CLI setup the
    first problem exits the program.
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @property
    @abstractmethod
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self):
        """Check for missing keys and fill in defaults."""
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        self.data = {**self.required, **self.optional, **self.data}

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


def is_vertex(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class GraphConfig(Config):

    """Configuration describing a graph by its order and a list of edges."""

    required = {
        "order": 0,
    }

    optional = {
        "edges": [],
    }

    def validate(self):
        super().validate()
        order = self.data["order"]
        if not is_vertex(order) or order < 0:
            logging.error(
                "%s: order must be a non-negative integer: %r", self.path, order
            )
            self.data["order"] = 0
        if not isinstance(self.data["edges"], list):
            logging.error("%s: edges must be a list", self.path)
            self.data["edges"] = []

    def edge_pairs(self) -> List[Tuple[int, int]]:
        """Return the well-formed [src, dest] entries as tuples.

        Malformed entries are logged and skipped.
        """
        pairs = []
        for i, entry in enumerate(self.data["edges"]):
            if (
                isinstance(entry, list)
                and len(entry) == 2
                and is_vertex(entry[0])
                and is_vertex(entry[1])
            ):
                pairs.append((entry[0], entry[1]))
            else:
                logging.error(
                    "%s: edge %d is not a [src, dest] pair: %r", self.path, i, entry
                )
        return pairs

    def build_graph(self) -> Graph:
        """Build the configured graph, skipping edges that cannot be added."""
        graph = Graph(self["order"])
        for src, dest in self.edge_pairs():
            try:
                graph.add_edge(src, dest)
            except GraphError as ex:
                logging.error(
                    "%s: cannot add edge (%d, %d): %s", self.path, src, dest, ex
                )
        logging.info("loaded %r from %s", graph, self.path)
        return graph
