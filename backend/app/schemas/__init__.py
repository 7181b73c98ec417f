# Common
from .common import PyObjectId, ObjectIdStr, OBJECT_ID_PATTERN

# Skill schemas
from .skill import SkillCreate, SkillResponse

# Job related schemas
from .job import (
    JobValidator, validate_job,
    JobResponse, JobIdResponse, JobDetailResponse, JobListResponse, JobSearchResponse
)

# Statistic schemas
from .statistic import (
    StatisticSkillsRequest, StatisticResponse, StatisticDetailResponse,
    StatisticAddResponse, StatisticRemoveResponse
)
