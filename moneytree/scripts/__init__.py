"""One module per operator script; each exposes ``run(console, session)`` and ``main()``."""
