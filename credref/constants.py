"""Well-known label and annotation keys."""

from __future__ import annotations

# Secrets carrying this label (value "true") are copied into control-plane
# namespaces and are the only ones the resolver indexes.
LABEL_COPY_TO_CP_NAMESPACE = "core.orchestrate.cloud.sap/copy-to-cp-namespaces"

# Comma-separated list of repository URLs the Secret holds credentials for.
ANNOTATION_CREDENTIALS_FOR_URL = "core.orchestrate.cloud.sap/credentials-for-url"

LABEL_TRUE = "true"

KUBECONFIG_SECRET_KEY = "kubeconfig"
