from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List

from semantic._drives import SourceDrive
from semantic.visitors import Visitor

if TYPE_CHECKING:  # pragma: no cover
    from semantic._pipeline import (
        ConcatPipeline,
        DistinctPipeline,
        DropWhilePipeline,
        FilterPipeline,
        FlatMapPipeline,
        LimitPipeline,
        MapPipeline,
        ObservePipeline,
        ParallelPipeline,
        PeekPipeline,
        Pipeline,
        SkipPipeline,
        TakeWhilePipeline,
    )


class ToStringVisitor(Visitor[str], ABC):
    def __init__(self, max_len: int = 80) -> None:
        self.operation_reprs: List[str] = []
        self.max_len = max_len

    @staticmethod
    @abstractmethod
    def to_string(o: object) -> str: ...

    def visit_concat_pipeline(self, pipeline: "ConcatPipeline") -> str:
        self.operation_reprs.append(
            f"concat({pipeline._other.accept(type(self)(self.max_len))})"
        )
        return pipeline.upstream.accept(self)

    def visit_distinct_pipeline(self, pipeline: "DistinctPipeline") -> str:
        self.operation_reprs.append(
            f"distinct({self.to_string(pipeline._identifier)})"
        )
        return pipeline.upstream.accept(self)

    def visit_drop_while_pipeline(self, pipeline: "DropWhilePipeline") -> str:
        self.operation_reprs.append(
            f"drop_while({self.to_string(pipeline._predicate)})"
        )
        return pipeline.upstream.accept(self)

    def visit_filter_pipeline(self, pipeline: "FilterPipeline") -> str:
        self.operation_reprs.append(f"filter({self.to_string(pipeline._predicate)})")
        return pipeline.upstream.accept(self)

    def visit_flat_map_pipeline(self, pipeline: "FlatMapPipeline") -> str:
        self.operation_reprs.append(f"flat_map({self.to_string(pipeline._mapper)})")
        return pipeline.upstream.accept(self)

    def visit_limit_pipeline(self, pipeline: "LimitPipeline") -> str:
        self.operation_reprs.append(f"limit({self.to_string(pipeline._count)})")
        return pipeline.upstream.accept(self)

    def visit_map_pipeline(self, pipeline: "MapPipeline") -> str:
        self.operation_reprs.append(f"map({self.to_string(pipeline._mapper)})")
        return pipeline.upstream.accept(self)

    def visit_observe_pipeline(self, pipeline: "ObservePipeline") -> str:
        self.operation_reprs.append(
            f"observe({self.to_string(pipeline._subject)}, do={self.to_string(pipeline._do)})"
        )
        return pipeline.upstream.accept(self)

    def visit_parallel_pipeline(self, pipeline: "ParallelPipeline") -> str:
        self.operation_reprs.append(
            f"parallel({self.to_string(pipeline.concurrency)})"
        )
        return pipeline.upstream.accept(self)

    def visit_peek_pipeline(self, pipeline: "PeekPipeline") -> str:
        self.operation_reprs.append(f"peek({self.to_string(pipeline._consumer)})")
        return pipeline.upstream.accept(self)

    def visit_skip_pipeline(self, pipeline: "SkipPipeline") -> str:
        self.operation_reprs.append(f"skip({self.to_string(pipeline._count)})")
        return pipeline.upstream.accept(self)

    def visit_take_while_pipeline(self, pipeline: "TakeWhilePipeline") -> str:
        self.operation_reprs.append(
            f"take_while({self.to_string(pipeline._predicate)})"
        )
        return pipeline.upstream.accept(self)

    def visit_pipeline(self, pipeline: "Pipeline") -> str:
        if isinstance(pipeline.source, SourceDrive):
            source_pipeline = repr(pipeline.source)
        else:
            source_pipeline = f"iterate({self.to_string(pipeline.source)})"
        if pipeline.concurrency != 1:
            self.operation_reprs.append(
                f"parallel({self.to_string(pipeline.concurrency)})"
            )
        depth = len(self.operation_reprs) + 1
        if depth == 1:
            return source_pipeline
        one_liner_repr = f"{source_pipeline}.{'.'.join(reversed(self.operation_reprs))}"
        if len(one_liner_repr) <= self.max_len:
            return one_liner_repr
        operations_repr = "".join(
            f"    .{operation_repr}\n"
            for operation_repr in reversed(self.operation_reprs)
        )
        return f"(\n    {source_pipeline}\n{operations_repr})"


class ReprVisitor(ToStringVisitor):
    @staticmethod
    def to_string(o: object) -> str:
        return repr(o)


class StrVisitor(ToStringVisitor):
    @staticmethod
    def to_string(o: Any) -> str:
        if repr(o).startswith("<"):
            return getattr(o, "__name__", repr(o))
        return repr(o)
