"""Worked solutions to the exercises, grouped by topic."""