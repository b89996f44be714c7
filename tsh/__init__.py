"""tsh - pick a directory with fzf and open a tmux session for it."""
