"""Track the busiest stretch of overlapping driver breaks over one day."""
