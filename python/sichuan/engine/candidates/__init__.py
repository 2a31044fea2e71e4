from sichuan.engine.candidates.candidates import CandidateOrder, generate_candidates

__all__ = ["CandidateOrder", "generate_candidates"]
