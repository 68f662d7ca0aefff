"""
vitrine - portfolio site content pipeline and static renderer

Builds a personal portfolio website (home page, ventures showcase, blog,
experience timeline, scheduling/contact section) from a directory of
Markdown files with YAML metadata headers.

Architecture:
- Content Context: content store loading, metadata validation, selection and ordering
- Presentation Context: record-to-view mapping, templates, page rendering, widget state
"""

__version__ = "0.1.0"
