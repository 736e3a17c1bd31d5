from .match_model import MatchModel
from .participant_model import ParticipantModel
from .standing_model import ParticipantSnapshot, ParticipantStats
from .tournament_model import FinalStandings, RoundAdvance, RoundStart, TournamentType
