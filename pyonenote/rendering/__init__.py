"""Rendering support for OneNote content nodes.

Contains:
- styles: StyleSet and the paragraph/run style resolvers
- whitespace: line break and indentation handling
- runs: run splitting and hyperlink stitching
- attachments: file name registry, type guessing and embed markup
- renderer_iface: the note-tag seam
- renderer: paragraph and embedded file renderers
- exporter: page-level helpers used by the CLI
"""
