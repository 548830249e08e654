"""Services applicatifs : orchestration du catalogue, posters, export."""
