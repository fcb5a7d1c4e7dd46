"""Progress module: hearts, points, completion records and the attempt state machine."""
