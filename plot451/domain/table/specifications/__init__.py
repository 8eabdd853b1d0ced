from .no_duplicated_column_names import NoDuplicatedColumnNamesSpecification

__all__ = ["NoDuplicatedColumnNamesSpecification"]
