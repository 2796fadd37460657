from .merge_field_service import MergeFieldService

__all__ = ["MergeFieldService"]
