"""Classgrade backend: assignment tracking and assisted grading."""
