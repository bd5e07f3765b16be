"""Pattern-related command handlers."""

import argparse
from typing import TYPE_CHECKING, Any, Dict

from pattern_catalog.domain.base.exceptions import ValidationError

if TYPE_CHECKING:
    from pattern_catalog.bootstrap import Application


def handle_list_patterns(args: argparse.Namespace, app: "Application") -> Dict[str, Any]:
    """Handle list patterns operations."""
    service = app.catalog_service
    patterns = service.list_patterns(getattr(args, "category", None))
    return {
        "patterns": [info.to_dict() for info in patterns],
        "count": len(patterns),
    }


def handle_show_pattern(args: argparse.Namespace, app: "Application") -> Dict[str, Any]:
    """Handle show pattern operations."""
    info = app.catalog_service.get_pattern(args.slug)
    return {"pattern": info.to_dict()}


def handle_run_patterns(args: argparse.Namespace, app: "Application") -> Dict[str, Any]:
    """Handle run pattern demo operations."""
    service = app.catalog_service
    slugs = getattr(args, "slugs", None) or []
    run_all = getattr(args, "all", False)

    if run_all and slugs:
        raise ValidationError("Specify pattern slugs or --all, not both")
    if not run_all and not slugs:
        raise ValidationError("Specify at least one pattern slug or --all")
    if not run_all and getattr(args, "category", None):
        raise ValidationError("--category can only be used with --all")

    if run_all:
        results = service.run_all(getattr(args, "category", None))
    else:
        results = [service.run_demo(slug) for slug in slugs]

    return {
        "results": [result.to_dict() for result in results],
        "count": len(results),
    }
