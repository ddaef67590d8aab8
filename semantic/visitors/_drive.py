from typing import TYPE_CHECKING, Any, TypeVar

from semantic import _drives
from semantic._drives import DriveProcedure
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

T = TypeVar("T")
U = TypeVar("U")


class DriveVisitor(Visitor[DriveProcedure[T]]):
    """
    Compiles a pipeline lineage into nested drives, the source drive being the innermost.
    """

    def visit_concat_pipeline(self, pipeline: "ConcatPipeline[T]") -> DriveProcedure[T]:
        return _drives.ConcatDrive(
            pipeline.upstream.accept(self),
            pipeline._other.accept(DriveVisitor[T]()),
        )

    def visit_distinct_pipeline(
        self, pipeline: "DistinctPipeline[T]"
    ) -> DriveProcedure[T]:
        return _drives.DistinctDrive(
            pipeline.upstream.accept(self),
            pipeline._identifier,
        )

    def visit_drop_while_pipeline(
        self, pipeline: "DropWhilePipeline[T]"
    ) -> DriveProcedure[T]:
        return _drives.DropWhileDrive(
            pipeline.upstream.accept(self),
            pipeline._predicate,
        )

    def visit_filter_pipeline(self, pipeline: "FilterPipeline[T]") -> DriveProcedure[T]:
        return _drives.FilterDrive(
            pipeline.upstream.accept(self),
            pipeline._predicate,
        )

    def visit_flat_map_pipeline(
        self, pipeline: "FlatMapPipeline[Any, T]"
    ) -> DriveProcedure[T]:
        return _drives.FlatMapDrive(
            pipeline.upstream.accept(DriveVisitor[Any]()),
            pipeline._mapper,
        )

    def visit_limit_pipeline(self, pipeline: "LimitPipeline[T]") -> DriveProcedure[T]:
        return _drives.LimitDrive(
            pipeline.upstream.accept(self),
            pipeline._count,
        )

    def visit_map_pipeline(self, pipeline: "MapPipeline[Any, T]") -> DriveProcedure[T]:
        return _drives.MapDrive(
            pipeline.upstream.accept(DriveVisitor[Any]()),
            pipeline._mapper,
        )

    def visit_observe_pipeline(self, pipeline: "ObservePipeline[T]") -> DriveProcedure[T]:
        return _drives.ObserveDrive(
            pipeline.upstream.accept(self),
            pipeline._subject,
            pipeline._do,
        )

    def visit_parallel_pipeline(
        self, pipeline: "ParallelPipeline[T]"
    ) -> DriveProcedure[T]:
        # the concurrency degree is configuration only: nothing to drive
        return pipeline.upstream.accept(self)

    def visit_peek_pipeline(self, pipeline: "PeekPipeline[T]") -> DriveProcedure[T]:
        return _drives.PeekDrive(
            pipeline.upstream.accept(self),
            pipeline._consumer,
        )

    def visit_skip_pipeline(self, pipeline: "SkipPipeline[T]") -> DriveProcedure[T]:
        return _drives.SkipDrive(
            pipeline.upstream.accept(self),
            pipeline._count,
        )

    def visit_take_while_pipeline(
        self, pipeline: "TakeWhilePipeline[T]"
    ) -> DriveProcedure[T]:
        return _drives.TakeWhileDrive(
            pipeline.upstream.accept(self),
            pipeline._predicate,
        )

    def visit_pipeline(self, pipeline: "Pipeline[T]") -> DriveProcedure[T]:
        return pipeline.source
