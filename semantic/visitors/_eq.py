from typing import Any

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
from semantic.visitors import Visitor


class EqualityVisitor(Visitor[bool]):
    def __init__(self, other: Any):
        self.other: Any = other

    def type_eq(self, pipeline: Pipeline) -> bool:
        return type(pipeline) is type(self.other)

    def upstream_eq(self, pipeline: Pipeline) -> bool:
        return self.type_eq(pipeline) and pipeline.upstream.accept(
            EqualityVisitor(self.other.upstream)
        )

    def visit_concat_pipeline(self, pipeline: ConcatPipeline) -> bool:
        return self.upstream_eq(pipeline) and pipeline._other == self.other._other

    def visit_distinct_pipeline(self, pipeline: DistinctPipeline) -> bool:
        return (
            self.upstream_eq(pipeline)
            and pipeline._identifier == self.other._identifier
        )

    def visit_drop_while_pipeline(self, pipeline: DropWhilePipeline) -> bool:
        return (
            self.upstream_eq(pipeline) and pipeline._predicate == self.other._predicate
        )

    def visit_filter_pipeline(self, pipeline: FilterPipeline) -> bool:
        return (
            self.upstream_eq(pipeline) and pipeline._predicate == self.other._predicate
        )

    def visit_flat_map_pipeline(self, pipeline: FlatMapPipeline) -> bool:
        return self.upstream_eq(pipeline) and pipeline._mapper == self.other._mapper

    def visit_limit_pipeline(self, pipeline: LimitPipeline) -> bool:
        return self.upstream_eq(pipeline) and pipeline._count == self.other._count

    def visit_map_pipeline(self, pipeline: MapPipeline) -> bool:
        return self.upstream_eq(pipeline) and pipeline._mapper == self.other._mapper

    def visit_observe_pipeline(self, pipeline: ObservePipeline) -> bool:
        return (
            self.upstream_eq(pipeline)
            and pipeline._subject == self.other._subject
            and pipeline._do == self.other._do
        )

    def visit_parallel_pipeline(self, pipeline: ParallelPipeline) -> bool:
        return (
            self.upstream_eq(pipeline)
            and pipeline.concurrency == self.other.concurrency
        )

    def visit_peek_pipeline(self, pipeline: PeekPipeline) -> bool:
        return (
            self.upstream_eq(pipeline) and pipeline._consumer == self.other._consumer
        )

    def visit_skip_pipeline(self, pipeline: SkipPipeline) -> bool:
        return self.upstream_eq(pipeline) and pipeline._count == self.other._count

    def visit_take_while_pipeline(self, pipeline: TakeWhilePipeline) -> bool:
        return (
            self.upstream_eq(pipeline) and pipeline._predicate == self.other._predicate
        )

    def visit_pipeline(self, pipeline: Pipeline) -> bool:
        return (
            self.type_eq(pipeline)
            and pipeline.source == self.other.source
            and pipeline.concurrency == self.other.concurrency
        )
