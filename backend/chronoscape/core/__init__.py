"""
Chronoscape core - background resolution for historical documents.

- era: date string -> era bucket and decade token
- location: place name -> location code (alias table)
- candidates: ordered asset identifiers, most specific first
- probe: asset existence checks (HTTP, manifest, cache)
- resolver: probes candidates in order and returns the first hit

Everything here is free of configuration; services wire it to Settings.
"""
