"""
Sample: a fail-fast store exits the process as soon as a required setting is missing or malformed.

Run it and check the exit status: ``python use_fail_fast.py; echo $?`` prints 1.
"""

from confstore import ConfigStore

config = ConfigStore.loads(b'{"hosts": [1, 2]}', fail_fast=True)

print("optional lookups still raise:", config.get("hosts"))
config.get_required_string_slice("hosts")  # elements are not strings: logs an error and exits with status 1
print("never reached")
