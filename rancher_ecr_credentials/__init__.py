"""Rancher ECR credential synchronization sidecar."""
