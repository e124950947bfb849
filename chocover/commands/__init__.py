"""CLI subcommands for chocover."""
