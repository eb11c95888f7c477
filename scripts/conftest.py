# Needs live databases; run it directly instead.
collect_ignore = ["test_connections.py"]
