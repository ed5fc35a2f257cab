# jk8s

Python models and start-up settings for an operator that runs Jupyter
workspaces on Kubernetes.

The package describes the custom resources of the
`workspaces.jupyter.org/v1alpha1` API group, and parses the command-line
flags of the controller that manages them:

- **Workspace** (`jk8s.workspace`): a single Jupyter server, with its image,
  desired status, resources, storage, extra volumes, container command and
  arguments, scheduling rules, access strategy and an optional template
  reference.
- **WorkspaceTemplate** (`jk8s.template`): a reusable, cluster-wide base
  configuration with a default image, an allow-list of images, default
  resources, resource bounds, primary storage limits and environment
  variables.
- **WorkspaceAccessStrategy** (`jk8s.access_strategy`): templates for the
  resources, environment variables and access URL that make a workspace
  reachable.

Every resource class converts to and from the plain dictionaries used in
Kubernetes manifests (`to_dict` / `from_dict`), so it works with any YAML or
JSON loader and any Kubernetes client.

## Installation

The package has no runtime dependencies and supports Python 3.10 and later.
Install it with your usual tool from a checkout of this project; the `test`
extra adds pytest.

## Working with resources

```python
from jk8s.workspace import Workspace

manifest = {
    "apiVersion": "workspaces.jupyter.org/v1alpha1",
    "kind": "Workspace",
    "metadata": {"name": "my-notebook", "namespace": "default"},
    "spec": {
        "displayName": "My Notebook",
        "templateRef": "production-notebook-template",
        "resources": {"requests": {"cpu": "1", "memory": "2Gi"}},
        "storage": {"size": "20Gi"},
    },
}

workspace = Workspace.from_dict(manifest)
assert Workspace.from_dict(workspace.to_dict()) == workspace
```

`Workspace`, `WorkspaceTemplate`, `WorkspaceAccessStrategy` and their list
types (`WorkspaceList`, `WorkspaceTemplateList`,
`WorkspaceAccessStrategyList`) all behave this way. `to_dict` fills in
`apiVersion` and `kind` and leaves out empty optional fields; `from_dict`
raises `ValueError` when the manifest names a different `apiVersion` or
`kind`.

Defaults follow the resource definitions: storage sizes default to `10Gi`,
the storage mount path to `/home/jovyan`, and a template's
`allowSecondaryStorages` to `true`. Resource quantities such as `500m` or
`10Gi` are kept as strings; resources, affinity, tolerations, lifecycle hooks
and environment variables are kept as plain dictionaries.

A few rules are checked when an object is built, each raising `ValueError`:

- `WorkspaceSpec.desired_status` must be empty, `Running` or `Stopped`.
- `WorkspaceTemplateSpec.display_name` must be 1 to 100 characters,
  `default_image` 1 to 500, `description` at most 500, and
  `allowed_images` may hold at most 50 entries.

Object metadata and status conditions are handled by `ObjectMeta` and
`Condition` in `jk8s.meta`. `GROUP_VERSION` is the API group-version, and
`GroupVersion.with_kind` returns the `apiVersion`/`kind` pair of a resource:

```python
from jk8s.meta import GROUP_VERSION

GROUP_VERSION.with_kind("Workspace")
# {'apiVersion': 'workspaces.jupyter.org/v1alpha1', 'kind': 'Workspace'}
```

## Controller options

`jk8s.options` holds the settings handed to the workspace controller:
`WorkspaceControllerOptions`, the `PullPolicy` enum and `GVKWatch`. Extra
resource kinds to watch are given as a comma-separated list of
`group/version/kind` entries:

```python
from jk8s.options import get_image_pull_policy, parse_gvk_watches

watches = parse_gvk_watches("traefik.io/v1alpha1/IngressRoute,apps/v1/Deployment")
policy = get_image_pull_policy("always")   # PullPolicy.ALWAYS
```

An empty list yields no watches; an entry that does not have exactly three
parts raises `ValueError`. Pull policy names are matched without regard to
case, and anything unrecognised falls back to `IfNotPresent`.

## Command-line settings

`jk8s.cli` parses the flags of the operator and of the stand-alone manager
into frozen settings objects:

```python
from jk8s.cli import controller_options, parse_manager_args

settings = parse_manager_args([
    "--application-images-pull-policy", "Never",
    "--application-images-registry", "registry.example.com/team",
    "--watch-traefik",
    "--watch-resources-gvk", "apps/v1/Deployment",
])
options = controller_options(settings)
```

- `parse_manager_args` returns `ManagerSettings`: metrics and probe
  addresses, leader election, image pull policy and registry,
  `--require-template`, `--watch-traefik` and `--watch-resources-gvk`.
- `parse_operator_args` returns `OperatorSettings`, which adds secure
  metrics, webhook and metrics certificate locations, `--enable-http2` and
  the logging flags (`--zap-devel`, `--zap-encoder`, `--zap-log-level`,
  `--zap-stacktrace-level`, `--zap-time-encoding`). Webhooks are enabled
  unless the `ENABLE_WEBHOOKS` environment variable is `false`. Its
  properties `disable_http2`, `tls_next_protos`, `webhook_cert_files`,
  `metrics_cert_files` and `metrics_enabled` derive server settings from
  the flags.
- `controller_options` turns either settings object into
  `WorkspaceControllerOptions`, raising `ValueError` on a malformed GVK list.

Flags may be written with one or two dashes. Boolean flags may be given
alone (meaning true) or with a value, as in `--metrics-secure=false`.
`build_operator_parser` and `build_manager_parser` return the underlying
`argparse` parsers if you want to extend them.

## What this package does not do

The package only models resources and parses settings. It does not connect
to a Kubernetes cluster, run a controller or reconcile workspaces, serve
admission webhooks, metrics or health probes, resolve workspaces against
templates, or enforce rules that the cluster applies on update, such as the
immutability of a workspace's template reference or a template's spec. It
installs no commands.