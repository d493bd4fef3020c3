"""
Parsing and formatting of host/port strings.

hostport turns strings such as “127.0.0.1:9876”, “[2001:db8::1]:80”, and “localhost”
into immutable HostAndPort values and renders them back in a canonical form. It tells an
IPv6 literal’s colons apart from the colon before the port, accepts hosts with and
without brackets, and checks the port range. It performs no I/O and no name resolution.

The value type lives in the address module, the errors in the errors module, and the
port range check in the validate module.
"""
