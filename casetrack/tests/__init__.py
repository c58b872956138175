"""Test suite for casetrack.

Organized into three categories:

1. core/: Unit tests for the tracking logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for the replay and CLI adapters
   - Exercise script parsing, replay and output formatting

3. fakes/: Port implementations for testing
   - In-memory implementations of TestDescription and SuiteNodePort
"""
