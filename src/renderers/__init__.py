"""Renderers for extracted color segments."""

from .html_renderer import markup_to_html, segments_to_element, segments_to_html

__all__ = ['markup_to_html', 'segments_to_element', 'segments_to_html']
