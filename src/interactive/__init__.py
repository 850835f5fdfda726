"""Terminal front end for the video poker engine."""
