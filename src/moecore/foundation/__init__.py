"""Foundation layer: solutions, comparators, populations, errors and logging."""
