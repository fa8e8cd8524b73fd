"""Migration class mapper: foreign-dialect tokens -> brisk tokens plus verdicts."""

from brisk.migration.mapper import (
    ClassMapper,
    analyze_class_compatibility,
    extract_classes,
    generate_migration_suggestions,
    get_class_category,
    group_classes_by_category,
    map_class,
    map_classes,
    substitute_template,
)
from brisk.migration.model import ClassMapping, CompatibilityReport, MappingRule
from brisk.migration.rules import CATEGORIES, TAILWIND_RULES

__all__ = [
    "ClassMapper",
    "ClassMapping",
    "CompatibilityReport",
    "MappingRule",
    "TAILWIND_RULES",
    "CATEGORIES",
    "analyze_class_compatibility",
    "extract_classes",
    "generate_migration_suggestions",
    "get_class_category",
    "group_classes_by_category",
    "map_class",
    "map_classes",
    "substitute_template",
]
