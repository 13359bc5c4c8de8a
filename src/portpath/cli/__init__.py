# Copyright (c) 2024 Portpath Contributors
# MIT License

"""Command-line interface for portpath."""
