"""keyqueue modules - each one a black box behind its package interface."""
