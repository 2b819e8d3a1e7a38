"""Headline provider implementations."""

from artistwall.providers.headline.http_headline_provider import HttpHeadlineProvider
from artistwall.providers.headline.template_headline_provider import TemplateHeadlineProvider

__all__ = ["HttpHeadlineProvider", "TemplateHeadlineProvider"]
