# Anchors pytest's rootdir so tests can import the package as `src.keytensor`.
