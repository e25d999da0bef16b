"""Services for git-desk: git access, stacking tool access and desk rules."""
