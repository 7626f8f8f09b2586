"""Guild directory and invocation context used while parsing arguments."""
