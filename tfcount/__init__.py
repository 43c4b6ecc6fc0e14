"""Run terraform/terragrunt plan and summarize the changes by resource type and action."""

__version__ = "0.1.0"