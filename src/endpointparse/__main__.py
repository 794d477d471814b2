"""Allow running the command-line front end as ``python -m endpointparse``."""

from .main import main

main()
