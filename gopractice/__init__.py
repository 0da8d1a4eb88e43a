"""Small worked programs: sorting, a calculator, a music library, an in-process game server, ICMP and HTTP tools, hashing, primes, a TLS echo pair and a photo site."""

__version__ = "0.1.0"