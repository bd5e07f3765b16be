"""Design pattern implementations, one module per pattern."""
