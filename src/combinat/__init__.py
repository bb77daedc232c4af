"""
combinat — generalized factorial functions over a numeric tower.

Contains factorial-like functions (falling/rising factorials, multifactorials,
subfactorial, Stirling numbers), the evaluation domain models and the JSON
contracts used to call them by name.
"""
