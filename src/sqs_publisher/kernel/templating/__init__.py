"""Kernel templating – pluggable expansion of ordering-field templates."""
from sqs_publisher.kernel.templating.renderer import FieldReferenceRenderer, TemplateRenderer

__all__ = ["FieldReferenceRenderer", "TemplateRenderer"]
