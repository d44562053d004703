"""Domain layer - map sites, mazes and their construction families."""
