# Path: `src/trackentry/features/entry/domain/__init__.py`
# Summary: Track entry value object and its supporting types.
# Why: Must stay import-free; track_entry imports ..diagnostics, which imports .outcomes.
