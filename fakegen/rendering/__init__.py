"""Record rendering, output formats and file output."""
