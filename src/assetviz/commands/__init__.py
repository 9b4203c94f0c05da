"""Click plumbing shared by the assetviz command line."""
