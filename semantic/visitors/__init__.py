from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from semantic import _pipeline

V = TypeVar("V")


class Visitor(ABC, Generic[V]):
    # fmt: off
    @abstractmethod
    def visit_pipeline(self, pipeline: _pipeline.Pipeline) -> V: ...
    # fmt: on

    def visit_concat_pipeline(self, pipeline: _pipeline.ConcatPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_distinct_pipeline(self, pipeline: _pipeline.DistinctPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_drop_while_pipeline(self, pipeline: _pipeline.DropWhilePipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_filter_pipeline(self, pipeline: _pipeline.FilterPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_flat_map_pipeline(self, pipeline: _pipeline.FlatMapPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_limit_pipeline(self, pipeline: _pipeline.LimitPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_map_pipeline(self, pipeline: _pipeline.MapPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_observe_pipeline(self, pipeline: _pipeline.ObservePipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_parallel_pipeline(self, pipeline: _pipeline.ParallelPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_peek_pipeline(self, pipeline: _pipeline.PeekPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_skip_pipeline(self, pipeline: _pipeline.SkipPipeline) -> V:
        return self.visit_pipeline(pipeline)

    def visit_take_while_pipeline(self, pipeline: _pipeline.TakeWhilePipeline) -> V:
        return self.visit_pipeline(pipeline)
