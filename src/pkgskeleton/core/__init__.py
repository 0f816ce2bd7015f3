"""
Template application and reconciliation engine.

This package contains the modular implementation of package generation:
- naming.py - Package name derivation from paths
- substitution.py - {KEY} placeholder substitution
- template.py - Template resolution, reading and application
- git.py - Git working tree queries
- reconcile.py - Classification of template files against the destination
- writer.py - Writing files and reporting
- values.py - Placeholder value resolution
- config.py - User configuration file
- generate.py - Main generate logic
"""

from __future__ import annotations

from .errors import (
    ConfigError,
    GitError,
    InvalidNameError,
    InvalidTargetError,
    MissingValueError,
    NotAFileError,
    NotARepositoryError,
    SkeletonError,
    SkeletonIOError,
    TemplateCollisionError,
    TemplateNotFoundError,
    UnsafePathError,
)
from .naming import PACKAGE_SUFFIX, name_from_path
from .substitution import placeholder, replacement_pairs, substitute
from .template import (
    BuiltinTemplate,
    PathTemplate,
    TemplateEntry,
    TemplateSource,
    apply_template,
    list_templates,
    parse_template_source,
    read_template,
    resolve_template_dir,
)
from .git import GitConfig, WorkingTreeStatus, working_tree_status
from .reconcile import Reconciliation, reconcile
from .writer import WriteReport, execute
from .values import ValueLookup, fill_replacement_values
from .config import SkeletonConfig, load_config
from .generate import GenerationResult, generate

__all__ = [
    # Errors
    "SkeletonError",
    "InvalidNameError",
    "InvalidTargetError",
    "TemplateNotFoundError",
    "TemplateCollisionError",
    "UnsafePathError",
    "SkeletonIOError",
    "NotARepositoryError",
    "NotAFileError",
    "GitError",
    "ConfigError",
    "MissingValueError",
    # Naming
    "PACKAGE_SUFFIX",
    "name_from_path",
    # Substitution
    "placeholder",
    "replacement_pairs",
    "substitute",
    # Templates
    "TemplateEntry",
    "BuiltinTemplate",
    "PathTemplate",
    "TemplateSource",
    "parse_template_source",
    "list_templates",
    "resolve_template_dir",
    "read_template",
    "apply_template",
    # Git
    "GitConfig",
    "WorkingTreeStatus",
    "working_tree_status",
    # Reconciliation and writing
    "Reconciliation",
    "reconcile",
    "WriteReport",
    "execute",
    # Values and configuration
    "ValueLookup",
    "fill_replacement_values",
    "SkeletonConfig",
    "load_config",
    # Generation
    "GenerationResult",
    "generate",
]
