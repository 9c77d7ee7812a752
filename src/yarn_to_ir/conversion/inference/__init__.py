from .remote_inference import DIRECTORY_RULES, REMOTE_RULES, infer_remote

__all__ = ["DIRECTORY_RULES", "REMOTE_RULES", "infer_remote"]
