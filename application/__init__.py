"""
Application Layer for the Family Fitness API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Session lifecycle, score completion, assignments and CRUD flows
- exceptions.py: Errors raised by use cases and adapters
"""
