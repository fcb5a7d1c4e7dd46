"""Domain layer: curriculum snapshots, learner progress and the rules that mutate it."""
