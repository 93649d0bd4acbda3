"""Chinese handwriting worksheet generation library.

Subpackages:
- worksheet.common: Shared utilities (utils, logging, errors, config, chat client)
- worksheet.input: Vocabulary sources (static table, CSV files, AI translation)
- worksheet.output: PDF output (canvas adapter, layout engine, pipeline)
- worksheet.schema: Entry definition
"""
