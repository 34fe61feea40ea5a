"""
hof Test Suite
==============

Test Organization
-----------------
- tests/unit/modules/ : Factory behaviour and invariants
- tests/unit/core/    : Configuration, logging and validation infrastructure

Testing Philosophy
------------------
- Fast, isolated unit tests; nothing touches the network or disk
- Use pytest markers to categorize and selectively run tests
- Follow AAA pattern: Arrange, Act, Assert
"""
