"""Degree and separation statistics for ego-network edge lists."""
