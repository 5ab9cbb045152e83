# NOTE: MODIFY TS ONLY WHEN U WANNA CHANGE THE DEFAULT PARAMETERS OF THE ANALYSIS.

# upper bounds of the degree buckets: <=10, 11-25, >25
DEFAULT_DEGREE_BINS = (10, 25)

# every sampler in the package is seeded with this unless told otherwise
DEFAULT_SEED = 42

# how many sources / nodes one worker handles at a time
DEFAULT_CHUNK_SIZE = 64

# above this many nodes the pipeline stops doing exact all-pairs bfs
# and samples DEFAULT_PATH_SAMPLE sources instead
EXACT_PATH_LIMIT = 5000
DEFAULT_PATH_SAMPLE = 500

# same idea for the jaccard search, which is O(V^2)
EXACT_SIMILARITY_LIMIT = 3000
DEFAULT_SIMILARITY_SAMPLE = 1000

# Humphries & Gurney (2008) small-world criteria
SMALL_WORLD_PATH_RATIO = 1.5
SMALL_WORLD_CLUSTERING_RATIO = 2.0

# avg hop count at or below this means every reachable pair is basically direct friends
INTERCONNECTED_PATH_LENGTH = 1.0

ALL_METRICS = ('degree', 'similarity', 'clustering', 'assortativity', 'paths', 'small_world')
