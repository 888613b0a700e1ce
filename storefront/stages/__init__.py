"""
Review panel stages.

Pure functions the panel runs on every view:
- Sort stage
- Filter stage
- Rating summary
- Review composition state machine
- Votes
"""
