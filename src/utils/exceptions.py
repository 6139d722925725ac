'''
Exception hierarchy for the LifeScore achievements engine.
'''


class LifeScoreError(Exception):
    '''Base class for all application-specific errors.'''


# --- Collaborator errors ---
class CollaboratorError(LifeScoreError):
    '''A collaborator the engine depends on failed; never recovered locally.'''


class ScoreEngineError(CollaboratorError):
    '''Raised when the score breakdown for a profile cannot be computed.'''


class StandingUnavailableError(CollaboratorError):
    '''Raised when the standing estimator cannot rank a LifeScore.'''


# --- Catalog errors ---
class CatalogError(LifeScoreError):
    '''Raised when the achievement catalog is built inconsistently.'''


class DuplicateAchievementError(CatalogError):
    pass


# --- Profile errors ---
class ProfileError(LifeScoreError):
    pass


class ProfileNotFoundError(ProfileError):
    '''Raised when a profile id is not present in the store.'''


class ConcurrentUpdateError(ProfileError):
    '''Raised when a profile changed in the store after it was read.'''
