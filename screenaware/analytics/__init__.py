"""Aggregation, tracker views and insight rules over a DailyLog snapshot."""
