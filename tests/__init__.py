"""
Test suite for combinat

Contains:
- tests/unit/          : Unit tests for the math core, domain models,
                         contracts and evaluator
"""
