"""ws - fuzzy-pick tmux sessions and workspace projects."""
