"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection

from dev import code_tasks, probe_tasks

ns = Collection()

dev_ns = Collection("dev")
dev_ns.add_collection(Collection.from_module(code_tasks), name="code")
ns.add_collection(dev_ns)
ns.add_collection(Collection.from_module(probe_tasks), name="ports")
