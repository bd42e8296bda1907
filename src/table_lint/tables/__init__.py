"""Markdown table detection and column-count validation.

Submodules:
  patterns     -- compiled regex patterns and templating keywords
  classifiers  -- row classification, cell splitting, template-row exemption
  scanner      -- table boundary state machine and the column-integrity rule
"""
