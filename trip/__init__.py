"""Trip planner: shared trip options with votes, comments and an optimistic client cache."""
