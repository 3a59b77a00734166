"""Built-in plugins shipped with formbind."""
