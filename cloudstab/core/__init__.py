"""Core storage and utility modules for cloudstab."""
