"""Model graph: named relations wired to their upstream relations.

A model is a pure function from its upstream relations (lists of row dicts or
row schemas) to one output relation. ``source`` models have no function; their
relation is read from the raw store and handed to ``run_models``.
"""
import heapq
import logging
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

MATERIALIZATIONS = ("source", "view", "table")


class PipelineError(Exception):
    """Base class for errors raised while scheduling or running models."""


class UnknownModelError(PipelineError):
    pass


class GraphCycleError(PipelineError):
    pass


@dataclass(frozen=True)
class Model:
    name: str
    build: Optional[Callable[..., list]] = None
    upstream: tuple[str, ...] = ()
    materialized: str = "view"


class ModelGraph:
    def __init__(self):
        self._models: dict[str, Model] = {}

    def add(self, model: Model) -> Model:
        if model.name in self._models:
            raise PipelineError(f"Model '{model.name}' is already registered")
        if model.materialized not in MATERIALIZATIONS:
            raise PipelineError(
                f"Model '{model.name}' has unknown materialization '{model.materialized}'"
            )
        if model.materialized == "source":
            if model.build is not None or model.upstream:
                raise PipelineError(f"Source '{model.name}' cannot have a build function or upstream")
        elif model.build is None:
            raise PipelineError(f"Model '{model.name}' has no build function")
        self._models[model.name] = model
        return model

    def __getitem__(self, name: str) -> Model:
        try:
            return self._models[name]
        except KeyError:
            raise UnknownModelError(f"No model named '{name}'") from None

    def validate(self):
        for model in self._models.values():
            for parent in model.upstream:
                if parent not in self._models:
                    raise UnknownModelError(
                        f"Model '{model.name}' depends on unknown model '{parent}'"
                    )

    def ancestors(self, name: str) -> set[str]:
        """Every model ``name`` reads from, directly or transitively."""
        seen: set[str] = set()
        stack = list(self[name].upstream)
        while stack:
            parent = stack.pop()
            if parent in seen:
                continue
            seen.add(parent)
            stack.extend(self[parent].upstream)
        return seen

    def order(self, select: Optional[str] = None) -> list[Model]:
        """Topological order of the graph, or of ``select`` and its ancestors.

        Models that become ready at the same time run in name order, so the
        same graph always yields the same order.
        """
        self.validate()
        if select is None:
            names = set(self._models)
        else:
            names = self.ancestors(select) | {select}

        remaining = {name: len(set(self._models[name].upstream)) for name in names}
        children: dict[str, list[str]] = {name: [] for name in names}
        for name in names:
            for parent in set(self._models[name].upstream):
                children[parent].append(name)

        ready = [name for name, count in remaining.items() if count == 0]
        heapq.heapify(ready)
        ordered = []
        while ready:
            name = heapq.heappop(ready)
            ordered.append(self._models[name])
            for child in children[name]:
                remaining[child] -= 1
                if remaining[child] == 0:
                    heapq.heappush(ready, child)

        if len(ordered) != len(names):
            stuck = sorted(name for name, count in remaining.items() if count > 0)
            raise GraphCycleError(f"Dependency cycle between models: {', '.join(stuck)}")
        return ordered


def run_models(graph: ModelGraph, sources: dict[str, list], select: Optional[str] = None) -> dict[str, list]:
    """Evaluate the graph in dependency order and return every relation by name."""
    relations: dict[str, list] = {}
    for model in graph.order(select):
        if model.materialized == "source":
            if model.name not in sources:
                raise PipelineError(f"Source '{model.name}' was not loaded")
            relations[model.name] = sources[model.name]
            continue
        inputs = [relations[parent] for parent in model.upstream]
        relations[model.name] = model.build(*inputs)
        logger.info(f"  {model.name} ({model.materialized}): {len(relations[model.name])} rows")
    return relations
