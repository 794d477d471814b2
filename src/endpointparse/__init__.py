"""
Parsing of network endpoint strings.

endpointparse turns strings such as “10.0.0.23:8000”, “[::1]:443” or “example.com:80”
into validated, immutable EndpointInfo values. It performs no DNS resolution and opens
no sockets.

The parser module holds the parse function, the types module the result types, and the
errors module one exception class per reason a string can be rejected. The main module
is a command-line front end, and also provides an argparse type callable for programs
that accept endpoints as options.
"""
